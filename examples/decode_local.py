"""
Decode a bundle that is already on disk

This script demonstrates:
- Reading the item count and header table of a bundle
- Decoding every valid data item
- Printing the decoded items as JSON

Usage: python examples/decode_local.py path/to/bundle.bin
"""

import logging
import sys
from pathlib import Path

from ans104_indexer import parse_bundle, read_header, to_json

logging.basicConfig(level=logging.INFO)

# 1. Load the raw container
raw = Path(sys.argv[1]).read_bytes()

# 2. Inspect the header table; all-zero ids will be skipped by the decoder
for position, entry in enumerate(read_header(raw)):
    print(f"#{position}: {entry.size_delta} bytes, id={entry.id}, valid={entry.is_valid}")

# 3. Decode the items
items = parse_bundle(raw)
print(f"Decoded {len(items)} items")

# 4. Serialise them the same way the CLI writes its output file
print(to_json(items))
