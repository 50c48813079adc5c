# Models package init
from ainotes.models.document import SOURCE_TYPES, Document
from ainotes.models.job import JOB_STATUSES, JOB_TYPES, SummaryJob
from ainotes.models.summary import SUMMARY_TYPES, Summary

__all__ = [
    "Document",
    "Summary",
    "SummaryJob",
    "SOURCE_TYPES",
    "SUMMARY_TYPES",
    "JOB_TYPES",
    "JOB_STATUSES",
]
