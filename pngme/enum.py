from enum import Flag


class ChunkProperty(Flag):
    '''The properties encoded by the case of each byte of a chunk type'''
    NONE         = 0
    CRITICAL     = 1 << 0
    PUBLIC       = 1 << 1
    RESERVED     = 1 << 2  # set means the type is not valid
    SAFE_TO_COPY = 1 << 3
