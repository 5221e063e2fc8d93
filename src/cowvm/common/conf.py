# Source format
MNEMONIC_SIZE = 3
COMMENT_CHARS = ';/'
WHITESPACE = ' \t\r\n\f\v'
SOURCE_ENCODING = 'ascii'

# Runtime I/O
END_OF_INPUT = -1       # Stored by Moo when stdin is exhausted
CHAR_MASK = 0xFFFF      # Moo prints a 16-bit code unit
