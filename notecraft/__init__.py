# notecraft/__init__.py
"""
Notecraft: recipes declared in entity notes, a crafting catalog and a
pygame crafting menu.
"""
__version__ = "0.1.0"
