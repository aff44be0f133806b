ChainId = int
