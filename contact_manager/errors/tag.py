"""Tag list errors"""

from contact_manager.errors.base import ApplicationError


class TagAlreadyExists(ApplicationError):
    http_code = 409
    error_code = 2001
    error = "Tag already exists"


class InvalidTagName(ApplicationError):
    http_code = 400
    error_code = 2002
    error = "Invalid tag name"
