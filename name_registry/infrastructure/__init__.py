"""Infrastructure Layer"""
