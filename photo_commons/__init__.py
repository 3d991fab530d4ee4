"""
Pictures photo-service commons

Shared configuration, logging, request parsing and Supabase-backed services
for the pictures Lambda functions.
"""

__version__ = "1.0.0"
