"""Layout constants and runtime defaults."""

# Bytes [0, 32) hold the item count; the header table starts right after.
HEADER_START = 32
COUNT_WIDTH = 32
HEADER_ENTRY_SIZE = 64
ID_LENGTH = 32

SIGNATURE_TYPE_WIDTH = 2
PRESENCE_FIELD_LENGTH = 32
TAG_COUNT_WIDTH = 8
TAG_SIZE_WIDTH = 8

# Integers wider than this are rejected rather than trusted as offsets.
MAX_UINT_BITS = 128

DEFAULT_GATEWAY = "https://arweave.net"
DEFAULT_TIMEOUT_SECONDS = 30.0

ENV_STRICT = "ANS104_STRICT"
ENV_GATEWAY = "ANS104_GATEWAY"
ENV_TIMEOUT = "ANS104_TIMEOUT"
