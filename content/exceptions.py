from rest_framework import status
from rest_framework.exceptions import APIException


class UnknownSectionError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Unknown portfolio section."
    default_code = "unknown_section"

    def __init__(self, section):
        self.section = section
        super().__init__(f"Unknown portfolio section: {section!r}")


class DuplicateNameError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "A record with this name already exists."
    default_code = "duplicate_name"

    def __init__(self, name, kind="record"):
        self.name = name
        super().__init__(f'A {kind} with the name "{name}" already exists')


class CategoryInUseError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Category is still in use."
    default_code = "category_in_use"

    def __init__(self, count):
        self.count = count
        super().__init__(f"Cannot delete category: {count} project(s) are using this category")
