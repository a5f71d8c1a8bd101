"""Grid algorithms and shared helpers"""
