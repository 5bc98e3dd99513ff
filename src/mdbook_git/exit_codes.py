from __future__ import annotations

OK = 0
ERR_UNSUPPORTED = 1
ERR_USAGE = 2
ERR_CONFIG = 3
ERR_PROTOCOL = 4
ERR_INTERNAL = 99
