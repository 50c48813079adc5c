# Routes package init
"""
AI Notes Backend — API Routes Package
=====================================

Route Inventory:
    - documents.py:  createDocument, updateDocument, deleteDocument,
                     listDocuments, getDocumentWithSummaries
    - summaries.py:  createSummary, listSummaries
    - jobs.py:       createJob, updateJob, listJobs
    - health.py:     GET /health

All procedures are POST /api/actions/<name>. Routes stay thin: resolve the
caller, let FastAPI validate the body, call the service, wrap the result.
"""
