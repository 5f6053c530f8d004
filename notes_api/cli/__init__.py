"""
CLI Client Module.

Thin HTTP client for talking to a running Notes API server, plus the
scripted demo walk-through used by `python run.py --action demo`.

All requests carry an X-Frontend-ID: cli header for log routing.
"""
