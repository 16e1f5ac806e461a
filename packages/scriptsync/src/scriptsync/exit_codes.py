from __future__ import annotations

OK = 0
ERR_GENERIC = 1
ERR_USAGE = 2
ERR_DRIFT = 3
ERR_IO = 4
ERR_CONFIG = 5
ERR_INTERNAL = 99
