from __future__ import annotations

import os


MAX_GROUP_SIZE = int(os.environ.get("LODSHAPES_MAX_GROUP_SIZE", "200"))
MAX_DIAMETER_SIZE = int(os.environ.get("LODSHAPES_MAX_DIAMETER_SIZE", "50"))
MAX_PATTERN_SIZE = int(os.environ.get("LODSHAPES_MAX_PATTERN_SIZE", "3000"))
MAX_CHROMATIC_SIZE = int(os.environ.get("LODSHAPES_MAX_CHROMATIC_SIZE", "3000"))
TOP_DEGREES = int(os.environ.get("LODSHAPES_TOP_DEGREES", "5"))
