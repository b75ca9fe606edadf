"""
Application layer for the notifications bounded context.

Use cases coordinate the dispatcher to fulfill subscribe, unsubscribe
and publish requests. No framework or infrastructure imports allowed.
"""
