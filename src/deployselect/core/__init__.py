"""Resolution and reconciliation engine."""

from deployselect.core.discovery import is_dockerfile, list_dirs_and_files, list_dockerfiles
from deployselect.core.filters import DeployedFilter, apply_filters, env_filter, types_filter
from deployselect.core.labels import LabelBuilder
from deployselect.core.reconcile import annotate_types, filter_by_names, intersect
from deployselect.core.resolve import Resolver
from deployselect.core.utils import collaborator_stage, ordinal

__all__ = [
    "DeployedFilter",
    "LabelBuilder",
    "Resolver",
    "annotate_types",
    "apply_filters",
    "collaborator_stage",
    "env_filter",
    "filter_by_names",
    "intersect",
    "is_dockerfile",
    "list_dirs_and_files",
    "list_dockerfiles",
    "ordinal",
    "types_filter",
]
