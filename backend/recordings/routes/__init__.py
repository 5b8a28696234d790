# Routes package init
"""
Recordings API: Routes Package
===============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - albums.py:  POST /albums               (add an album, returns its id)
                  GET  /albums/artist?name=  (albums by artist)
                  GET  /albums/get?albumId=  (single album)
    - health.py:  GET  /health               (database reachability)

Routes stay thin: they parse input, call the AlbumStore, and return the
result. Status codes for failures come from the exception handlers.
"""
