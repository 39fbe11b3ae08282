from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    """
    Account owning revision schedules. Deleting it removes them.
    """

    pass
