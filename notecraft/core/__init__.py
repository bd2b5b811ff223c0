# notecraft/core/__init__.py
