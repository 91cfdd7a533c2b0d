"""Magic entries, sliding-piece attack generation and magic number search."""