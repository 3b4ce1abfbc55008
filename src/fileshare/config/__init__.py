"""
Operational settings for the fileshare tooling itself.

The service's own GOKAPI_* startup record lives in fileshare.environment;
this package only holds knobs such as the log level.
"""
