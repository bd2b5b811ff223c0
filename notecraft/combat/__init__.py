# notecraft/combat/__init__.py
