"""
Notifications bounded context — domain layer.

This module contains the domain logic for email notifications:
- Email address validation
- Subscription handles and their lifecycle
- Topic-wide broadcast dispatch through a pub/sub gateway port
"""
