"""
Source Code Store Django project.
"""
