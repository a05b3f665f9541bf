"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    USERNAME = "username"
    PASSWORD = "password"
    ACCESS_TOKEN = "accessToken"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
