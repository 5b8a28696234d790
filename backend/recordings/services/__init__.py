"""
Recordings API: Services Package
=================================

What:  Data access for the album table.

Modules:
    - album_store.py: AlbumStore interface, SQLAlbumStore implementation
                      and the get_album_store FastAPI dependency
"""
