"""NiceGUI interface - thin visualization layer over the API client.

Responsibilities:
    - Session sidebar (list, create, delete)
    - PDF upload that opens a PDF-mode session
    - Chat history display and message sending

Contains no business logic. Delegates all operations to the backend via
pdfchat.client.
"""
