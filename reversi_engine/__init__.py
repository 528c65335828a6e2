# reversi_engine/__init__.py
# Zachary Chan c3468750
__version__ = "1.0.0"
