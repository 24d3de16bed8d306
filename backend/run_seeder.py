"""Utility script to populate demo data for local environments.

Usage: ``python run_seeder.py run`` (see ``--help`` for the other commands).
"""

from demo_seed.cli import main


if __name__ == "__main__":
	main()
