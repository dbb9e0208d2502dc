"""
Momentum - habit goals, check-ins, points and levels backed by Supabase
"""
__version__ = "0.1.0"
