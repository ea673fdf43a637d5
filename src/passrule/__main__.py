"""Entry point for 'python -m passrule' command."""

from passrule.cli import main

if __name__ == "__main__":
    main()
