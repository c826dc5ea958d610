"""Tenant gateway: tenant-scoped API and real-time notification relay."""
