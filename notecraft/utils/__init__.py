# notecraft/utils/__init__.py
