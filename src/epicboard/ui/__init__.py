"""
epicboard.ui — everything between the keyboard and the entity store.

Modules:
    actions     the Action vocabulary pages emit
    navigator   page frames and the Navigator page stack
    pages       input → Action translation and rich rendering per page
    prompts     Prompts capability: console and scripted implementations
    format      text wrapping and status colours
    app         the interactive read/dispatch/render loop
"""
