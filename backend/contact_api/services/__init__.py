"""Business Logic Services.

This package contains the service modules that implement the core
business logic of the Contact Directory API.

Services:
- contact_service: Contact directory with unique names and profile images
- message_service: Append-only message threads per contact
- auth_service: Username/password check returning a role
- image_storage: Local folder for uploaded profile images
"""
