"""ClaimCheck - verify claims against a small corpus of documents and web pages.

Uploaded files (text, PDF, Word, images) and fetched web pages are reduced to
plain text, kept in a session-scoped store, and sent together with the claim
to a language-model judge in a single request.

Components:
- ingest: upload validation and format-specific text extraction
- retrieval: URL fetching and main-content extraction
- store: the session's source collection
- llm: judge client, verdict classification and orchestration
- pipeline: the Session that ties them together
- main_cli: command-line host
"""
