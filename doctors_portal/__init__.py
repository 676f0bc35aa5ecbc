"""
Doctors Portal

FastAPI backend for booking medical appointments: user registration,
appointments, doctor profiles and Stripe payment intents, stored in MongoDB
and guarded by Firebase ID tokens.
"""

__version__ = "1.0.0"
