"""ABOUTME: User-facing error messages shown by the signup application under test
ABOUTME: Shared by the form validator and the BDD scenarios that assert on page text"""

ERROR_MESSAGES = {
    "invalid_email": "Please enter a valid email address",
    "disposable_email": "Disposable email addresses are not allowed",
    "invalid_code": "Invalid verification code",
}
