"""Entry point for 'python -m rbacadmin'."""

from rbacadmin.cli import main

if __name__ == "__main__":
    main()
