"""
Startup configuration and file metadata serialization for the file sharing service.

Contains the GOKAPI_* environment resolver and the JSON result contract
returned for a single file's metadata.
"""
