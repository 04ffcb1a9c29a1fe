# Per-field messages shared by the upload route and the assignment form.
REQUIRED_MESSAGES = {
    "title": "Title is required",
    "description": "Description is required",
    "visibleDate": "Visible Date is required",
    "file": "File is required",
}
