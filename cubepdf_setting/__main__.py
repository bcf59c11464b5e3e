"""Entry point: python -m cubepdf_setting"""

from cubepdf_setting.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
