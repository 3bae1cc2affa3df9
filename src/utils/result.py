class ActionResult:
    """Outcome of a browser interaction.

    Interactions never raise; they return one of these so the caller can tell
    an empty-but-successful search from a failed one.
    """

    def __init__(self, success, reason=None, data=None):
        self.success = success
        self.reason = reason
        self.data = data

    @classmethod
    def ok(cls, data=None):
        return cls(True, data=data)

    @classmethod
    def failed(cls, reason, data=None):
        return cls(False, reason=reason, data=data)

    def __bool__(self):
        return self.success

    def __repr__(self):
        if self.success:
            return f"ActionResult(success=True, data={self.data!r})"
        return f"ActionResult(success=False, reason={self.reason!r})"
