"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents (stored camelCase)"""
    USER_NAME = "userName"
    PASSWORD = "password"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
