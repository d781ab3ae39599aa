"""Run-terminating errors. ``str(exc)`` is the message shown to the operator."""


class PrsyncError(RuntimeError):
    pass


class MissingPullRequestError(PrsyncError):
    def __init__(self) -> None:
        super().__init__("No pull request found.")


class MissingDescriptionError(PrsyncError):
    def __init__(self) -> None:
        super().__init__("No description found for this pull request.")


class NoTaskLinksError(PrsyncError):
    def __init__(self) -> None:
        super().__init__("No task id found in the description. Or link is missing.")


class TaskFetchError(PrsyncError):
    def __init__(self, task_id: str, cause: object) -> None:
        self.task_id = task_id
        super().__init__(f"Failed to get task {task_id}: {cause}")


class TaskUpdateError(PrsyncError):
    def __init__(self, task_id: str, cause: object) -> None:
        self.task_id = task_id
        super().__init__(f"Failed to update task {task_id}: {cause}")


class NoCustomFieldsError(PrsyncError):
    def __init__(self) -> None:
        super().__init__("There is no custom fields in the task.")


class FieldNotFoundError(PrsyncError):
    def __init__(self) -> None:
        super().__init__("There is no Field with name Status or Dev Status.")


class MissingOptionsError(PrsyncError):
    def __init__(self, expected: tuple[str, ...], missing: tuple[str, ...]) -> None:
        self.missing = missing
        super().__init__(
            f"Not all options are available in the field. One or more options is missing: {','.join(expected)}"
        )
