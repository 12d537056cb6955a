"""
Job board backend with phone OTP verification.
"""

__version__ = "1.0.0"
