from __future__ import annotations

from splunk_hec.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
