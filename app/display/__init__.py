"""
Display client: fetches published menus over HTTP, keeps a local catalog
cache, and renders the TV screen image.
"""
