#!/usr/bin/env python3
from __future__ import annotations

from plato_installer.main import main


if __name__ == "__main__":
    # Must live at the root of the unpacked tarball, next to plato.service.
    raise SystemExit(main())
