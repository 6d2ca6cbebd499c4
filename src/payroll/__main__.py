"""Allow running the interactive menu as a module.

Usage:
    python -m payroll
"""

from payroll.cli.menu import main

if __name__ == "__main__":
    main()
