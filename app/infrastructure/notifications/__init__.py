"""
Infrastructure adapters for the notifications bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system, here AWS SNS through boto3.
"""
