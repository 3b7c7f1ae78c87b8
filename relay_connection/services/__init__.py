"""
Services Package

Pure pagination logic with no schema dependency:
- cursor.py: opaque ``type:id`` cursor codec
- connection.py: list-to-connection windowing
"""
