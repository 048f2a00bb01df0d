"""
Root test package marker.

Only this directory carries an __init__.py; the subdirectories are namespace
packages (PEP 420). Keeping this file makes pytest treat tests/ as a package
and keeps test imports stable across environments.
"""
