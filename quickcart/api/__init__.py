# quickcart/api/__init__.py
