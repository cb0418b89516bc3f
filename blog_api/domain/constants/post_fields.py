"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post documents"""
    ID = "id"
    TITLE = "title"
    CONTENT = "content"
    AUTHOR = "author"
    CREATED = "created"

    # Nested author sub-document
    AUTHOR_FIRST_NAME = "firstName"
    AUTHOR_LAST_NAME = "lastName"

    # Fields a client may change through an update
    UPDATABLE = (TITLE, CONTENT, AUTHOR)

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
