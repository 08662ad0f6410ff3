"""Exception hierarchy for context budget management."""


class ContextBudgetError(Exception):
    """Base class for all context budget errors."""


class ConfigError(ContextBudgetError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class SessionError(ContextBudgetError):
    """Base class for session store errors."""

    def __init__(self, message: str, session_file: str | None = None):
        super().__init__(message)
        self.session_file = session_file


class SessionNotFoundError(SessionError):
    """Raised when a session file does not exist."""


class SessionCorruptError(SessionError):
    """Raised when a session file holds entries that cannot be parsed."""

    def __init__(self, message: str, session_file: str | None = None, line: int | None = None):
        super().__init__(message, session_file)
        self.line = line


class SkillFrontmatterError(ContextBudgetError):
    """Raised when a SKILL.md frontmatter block is not a valid YAML mapping."""

    def __init__(self, message: str, file_path: str | None = None):
        super().__init__(message + (f" in {file_path}" if file_path else ""))
        self.file_path = file_path
