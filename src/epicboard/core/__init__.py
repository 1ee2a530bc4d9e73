"""
epicboard.core — persistence, domain model, and shared infrastructure.

Modules:
    models      Status, Epic, Story, DatabaseState
    store       Storage backends and the TrackerDatabase entity store
    rollup      Epic status derived from its stories
    config      Configuration loading (TOML + env vars)
    logging     Log file setup
    exceptions  Epicboard exception hierarchy
    constants   Exit codes, filesystem layout, limits
"""
