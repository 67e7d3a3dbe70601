"""Application Layer"""
