"""Identity and access management bounded context.

Owns application users, their reconciliation with the enterprise identity
provider, and the flat role/permission authorization model.
"""
