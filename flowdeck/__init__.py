"""flowdeck: browse workflow definitions stored in a Dataverse environment."""

from .clients import BaseWorkflowClient, DataverseClient, InMemoryWorkflowClient, get_client
from .contracts import FilterSet, PageState, SortSpec, Workflow, WorkflowPage
from .dashboard import WorkflowDashboard
from .errors import AuthError, FetchError, FlowdeckError

__version__ = "0.1.0"
__all__ = [
    "AuthError",
    "BaseWorkflowClient",
    "DataverseClient",
    "FetchError",
    "FilterSet",
    "FlowdeckError",
    "InMemoryWorkflowClient",
    "PageState",
    "SortSpec",
    "Workflow",
    "WorkflowDashboard",
    "WorkflowPage",
    "get_client",
]
