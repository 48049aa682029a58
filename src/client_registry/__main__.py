"""Entry point for running the client registry CLI with ``python -m client_registry``."""

from client_registry.main import main

if __name__ == "__main__":
    main()
