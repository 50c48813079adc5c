"""
AI Notes Backend — Document Procedure Tests
===========================================

What:  End-to-end tests of the five document procedures through the app,
       against a fresh in-memory database per test.

What we test:
    ✅ createDocument stamps owner, defaults and equal timestamps
    ✅ Schema failures → 400 validation_error naming the field
    ✅ Partial update writes only supplied fields; empty update is a no-op
    ✅ Another user's document is indistinguishable from a missing one
    ✅ Delete returns the removed row and leaves summaries/jobs as orphans
    ✅ getDocumentWithSummaries returns the document's summaries
"""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from sqlalchemy import func, select

from ainotes.models import Document, Summary

EDITED_AT = datetime(2099, 1, 1, tzinfo=timezone.utc)


async def _create(call_action, user="user-a", **fields):
    body = {"title": "Standup", "content": "Discussed the release plan.", **fields}
    response = await call_action("createDocument", body, user=user)
    assert response.status_code == 200, response.text
    return response.json()["document"]


class TestCreateDocument:

    @pytest.mark.asyncio
    async def test_create_returns_stamped_document(self, call_action):
        doc = await _create(call_action, tags="work,meetings")

        assert isinstance(doc["id"], int)
        assert doc["ownerId"] == "user-a"
        assert doc["title"] == "Standup"
        assert doc["sourceType"] == "manual"
        assert doc["sourceMeta"] is None
        assert doc["tags"] == "work,meetings"
        assert doc["createdAt"] == doc["updatedAt"]

    @pytest.mark.asyncio
    async def test_source_meta_is_stored_opaquely(self, call_action):
        meta = {"fileName": "lecture.pdf", "pages": [1, 2, 3], "ocr": {"lang": "en"}}
        doc = await _create(call_action, sourceType="upload", sourceMeta=meta)

        listed = (await call_action("listDocuments")).json()["documents"]
        assert listed[0]["id"] == doc["id"]
        assert listed[0]["sourceType"] == "upload"
        assert listed[0]["sourceMeta"] == meta

    @pytest.mark.asyncio
    async def test_missing_title_is_rejected(self, call_action):
        response = await call_action("createDocument", {"content": "body only"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"].startswith("title")

    @pytest.mark.asyncio
    async def test_empty_content_is_rejected(self, call_action):
        response = await call_action("createDocument", {"title": "t", "content": ""})

        assert response.status_code == 400
        assert response.json()["message"].startswith("content")

    @pytest.mark.asyncio
    async def test_unknown_source_type_is_rejected(self, call_action, db_session):
        response = await call_action(
            "createDocument", {"title": "t", "content": "c", "sourceType": "fax"}
        )

        assert response.status_code == 400
        assert response.json()["message"].startswith("sourceType")
        count = await db_session.scalar(select(func.count()).select_from(Document))
        assert count == 0


class TestUpdateDocument:

    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(self, call_action):
        doc = await _create(call_action, tags="draft")

        with patch("ainotes.services.document_service.utcnow", return_value=EDITED_AT):
            response = await call_action(
                "updateDocument", {"id": doc["id"], "title": "Standup (edited)"}
            )

        assert response.status_code == 200
        updated = response.json()["document"]
        assert updated["title"] == "Standup (edited)"
        assert updated["content"] == doc["content"]
        assert updated["tags"] == "draft"
        assert updated["createdAt"] == doc["createdAt"]
        assert updated["updatedAt"] > doc["updatedAt"]
        assert updated["updatedAt"].startswith("2099-01-01T00:00:00")

    @pytest.mark.asyncio
    async def test_id_only_update_changes_nothing(self, call_action):
        doc = await _create(call_action)

        response = await call_action("updateDocument", {"id": doc["id"]})

        assert response.status_code == 200
        assert response.json()["document"] == doc

    @pytest.mark.asyncio
    async def test_explicit_null_title_is_rejected(self, call_action):
        doc = await _create(call_action)

        response = await call_action("updateDocument", {"id": doc["id"], "title": None})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert response.json()["message"].startswith("title")

    @pytest.mark.asyncio
    async def test_explicit_null_clears_source_meta(self, call_action):
        doc = await _create(call_action, sourceMeta={"url": "https://example.com"})

        response = await call_action("updateDocument", {"id": doc["id"], "sourceMeta": None})

        assert response.status_code == 200
        assert response.json()["document"]["sourceMeta"] is None

    @pytest.mark.asyncio
    async def test_other_users_document_is_not_found(self, call_action):
        doc = await _create(call_action, user="user-a")

        response = await call_action(
            "updateDocument", {"id": doc["id"], "title": "hijacked"}, user="user-b"
        )

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"
        assert response.json()["message"] == "Document not found."

        fetched = await call_action("getDocumentWithSummaries", {"id": doc["id"]})
        assert fetched.json()["document"]["title"] == "Standup"

    @pytest.mark.asyncio
    async def test_owner_update_after_foreign_attempt(self, call_action):
        doc = await _create(call_action, user="user-a", title="Meeting")

        denied = await call_action("updateDocument", {"id": doc["id"], "title": "x"}, user="user-b")
        with patch("ainotes.services.document_service.utcnow", return_value=EDITED_AT):
            allowed = await call_action(
                "updateDocument", {"id": doc["id"], "title": "x"}, user="user-a"
            )

        assert denied.status_code == 404
        assert allowed.status_code == 200
        assert allowed.json()["document"]["title"] == "x"
        assert allowed.json()["document"]["updatedAt"] > doc["updatedAt"]


class TestDeleteDocument:

    @pytest.mark.asyncio
    async def test_delete_returns_removed_document(self, call_action):
        doc = await _create(call_action)

        response = await call_action("deleteDocument", {"id": doc["id"]})

        assert response.status_code == 200
        assert response.json()["document"] == doc

        gone = await call_action("getDocumentWithSummaries", {"id": doc["id"]})
        assert gone.status_code == 404
        assert (await call_action("listDocuments")).json()["documents"] == []

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, call_action):
        doc = await _create(call_action, user="user-a")

        response = await call_action("deleteDocument", {"id": doc["id"]}, user="user-b")

        assert response.status_code == 404
        listed = (await call_action("listDocuments", user="user-a")).json()["documents"]
        assert [d["id"] for d in listed] == [doc["id"]]

    @pytest.mark.asyncio
    async def test_missing_document_is_not_found(self, call_action):
        doc = await _create(call_action)

        response = await call_action("deleteDocument", {"id": 999_999})

        assert response.status_code == 404
        assert response.json()["message"] == "Document not found."
        listed = (await call_action("listDocuments")).json()["documents"]
        assert listed == [doc]

    @pytest.mark.asyncio
    async def test_referenced_document_is_deleted_leaving_orphans(self, call_action, db_session):
        doc = await _create(call_action)
        keep = await _create(call_action, title="keep")
        await call_action("createSummary", {"documentId": doc["id"], "content": "tl;dr"})
        await call_action("createSummary", {"documentId": keep["id"], "content": "kept"})
        await call_action("createJob", {"documentId": doc["id"]})

        response = await call_action("deleteDocument", {"id": doc["id"]})

        assert response.status_code == 200
        assert response.json()["document"]["id"] == doc["id"]

        summaries = (await call_action("listSummaries")).json()["summaries"]
        assert [s["content"] for s in summaries] == ["kept"]
        assert (await call_action("listJobs")).json()["jobs"] == []

        orphans = await db_session.scalar(
            select(func.count()).select_from(Summary).where(Summary.document_id == doc["id"])
        )
        assert orphans == 1

    @pytest.mark.asyncio
    async def test_deleted_id_is_not_reused(self, call_action):
        doc = await _create(call_action)
        await call_action("createSummary", {"documentId": doc["id"], "content": "old"})
        await call_action("deleteDocument", {"id": doc["id"]})

        fresh = await _create(call_action, title="fresh")

        assert fresh["id"] != doc["id"]
        body = (await call_action("getDocumentWithSummaries", {"id": fresh["id"]})).json()
        assert body["summaries"] == []


class TestListAndGet:

    @pytest.mark.asyncio
    async def test_list_is_scoped_to_caller(self, call_action):
        first = await _create(call_action, user="user-a", title="one")
        await _create(call_action, user="user-b", title="theirs")
        second = await _create(call_action, user="user-a", title="two")

        response = await call_action("listDocuments", user="user-a")

        assert response.status_code == 200
        documents = response.json()["documents"]
        assert [d["id"] for d in documents] == [first["id"], second["id"]]
        assert all(d["ownerId"] == "user-a" for d in documents)

    @pytest.mark.asyncio
    async def test_list_for_new_user_is_empty(self, call_action):
        await _create(call_action, user="user-a")

        response = await call_action("listDocuments", user="user-new")

        assert response.json() == {"documents": []}

    @pytest.mark.asyncio
    async def test_get_with_summaries(self, call_action):
        doc = await _create(call_action)
        other = await _create(call_action, title="other")
        await call_action("createSummary", {"documentId": doc["id"], "content": "short one"})
        await call_action(
            "createSummary",
            {"documentId": doc["id"], "content": "- a\n- b", "summaryType": "bullet_points"},
        )
        await call_action("createSummary", {"documentId": other["id"], "content": "elsewhere"})

        response = await call_action("getDocumentWithSummaries", {"id": doc["id"]})

        assert response.status_code == 200
        body = response.json()
        assert body["document"]["id"] == doc["id"]
        assert [s["summaryType"] for s in body["summaries"]] == ["short", "bullet_points"]
        assert all(s["documentId"] == doc["id"] for s in body["summaries"])

    @pytest.mark.asyncio
    async def test_get_without_summaries_returns_empty_list(self, call_action):
        doc = await _create(call_action, sourceMeta={"a": 1})

        response = await call_action("getDocumentWithSummaries", {"id": doc["id"]})

        assert response.json()["summaries"] == []
        assert response.json()["document"]["sourceMeta"] == {"a": 1}

    @pytest.mark.asyncio
    async def test_get_other_users_document_is_not_found(self, call_action):
        doc = await _create(call_action, user="user-a")

        response = await call_action("getDocumentWithSummaries", {"id": doc["id"]}, user="user-b")
        missing = await call_action("getDocumentWithSummaries", {"id": 999_999}, user="user-b")

        assert response.status_code == missing.status_code == 404
        assert response.json()["message"] == missing.json()["message"]
