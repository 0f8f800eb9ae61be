"""
Application Errors

Exception hierarchy shared by the storage layer and the route handlers.
"""


class WanderlistError(Exception):
    """Base class for all application errors"""


class ValidationError(WanderlistError):
    """Submitted credentials failed validation"""


class DuplicateUser(WanderlistError):
    """A user with this username already exists"""

    def __init__(self, username):
        super().__init__(f'Username already taken: {username}')
        self.username = username


class UserNotFound(WanderlistError):
    """No user with this username exists in the active store"""

    def __init__(self, username):
        super().__init__(f'Unknown user: {username}')
        self.username = username


class AlreadyPresent(WanderlistError):
    """The destination is already on the user's want-to-go list"""

    def __init__(self, username, destination):
        super().__init__(f'{destination} already listed for {username}')
        self.username = username
        self.destination = destination


class UnknownDestination(WanderlistError):
    """The destination name is not part of the catalog"""

    def __init__(self, name):
        super().__init__(f'Unknown destination: {name}')
        self.name = name


class StorageUnavailable(WanderlistError):
    """The persistent backend could not be reached at startup"""
