"""Enable running the hook as a module: python -m cc_version_updater."""

from cc_version_updater.cli import main

if __name__ == "__main__":
    main()
