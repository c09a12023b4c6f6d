"""
Routers module - API endpoint handlers organized by feature.

- generate: prompt/file to HTML app generation
"""
