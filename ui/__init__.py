"""
N64 Login - Qt User Interface

Login, registration and success screens drawn over a checkerboard background.
"""

__version__ = "1.0.0"
