"""
Photo-service business services
"""
