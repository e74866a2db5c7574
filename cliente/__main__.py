"""Permite ejecutar el cliente con ``python -m cliente``."""

from __future__ import annotations

from cliente.main import main

if __name__ == "__main__":
    raise SystemExit(main())
