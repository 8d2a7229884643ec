from .commit import CommitRecord
from .context import CommitContext, GeneratedNotesContext, ReleaseContext
from .invocation import InvocationContext
from .prompt import RenderedPrompt
from .pull_request import PRReference
from .release import ReleaseSubmission
from .repository import Repository

__all__ = [
	"CommitContext",
	"CommitRecord",
	"GeneratedNotesContext",
	"InvocationContext",
	"PRReference",
	"ReleaseContext",
	"ReleaseSubmission",
	"RenderedPrompt",
	"Repository",
]
