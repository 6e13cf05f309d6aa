from licenses.infrastructure.models import License, LicenseType  # noqa: F401
