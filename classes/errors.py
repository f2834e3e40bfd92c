class CheckInError(Exception):
    """Base error for check-in operations. Routes answer with `status_code`."""
    status_code = 400

    def __init__(self, message=None):
        super().__init__(message or self.__doc__)
        self.message = message or self.__doc__


class LessonNotFoundError(CheckInError):
    """Lesson not found"""
    status_code = 404

    def __init__(self, lesson_id=None):
        super().__init__(f"Lesson not found: {lesson_id}" if lesson_id else None)
        self.lesson_id = lesson_id


class LessonOwnershipError(CheckInError):
    """This lesson does not belong to you"""
    status_code = 403


class NotCheckedInError(CheckInError):
    """Teacher has not checked in to this lesson"""
    status_code = 409
