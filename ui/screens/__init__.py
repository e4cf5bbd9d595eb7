"""
UI Screens Package

Contains the login, registration and success screens.
"""

from .login_screen import LoginScreen
from .registration_screen import RegistrationScreen
from .login_success_screen import LoginSuccessScreen

__all__ = ['LoginScreen', 'RegistrationScreen', 'LoginSuccessScreen']
