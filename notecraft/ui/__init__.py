# notecraft/ui/__init__.py
