import pytest
from django.test import Client
from django.urls import reverse
from rest_framework import status

from revision.data.models import AyahRevision


@pytest.mark.django_db
class TestHeaderLoginCsrf:
    def setup_method(self):
        self.client = Client(enforce_csrf_checks=True)
        self.review_url = reverse("ayah-review", kwargs={"surah_id": 1, "ayah_number": 1})

    def test_header_post_is_accepted(self, django_user_model):
        django_user_model.objects.create_user(username="hafiz")

        response = self.client.post(
            self.review_url, data={"quality": 5},
            content_type="application/json", HTTP_X_USER_NAME="hafiz",
        )

        assert response.status_code == status.HTTP_201_CREATED

    def test_cookie_only_post_requires_csrf_token(self, django_user_model):
        """A session cookie left by an earlier header login is not enough to write"""
        django_user_model.objects.create_user(username="hafiz")
        self.client.get(reverse("user-me"), HTTP_X_USER_NAME="hafiz")
        assert "sessionid" in self.client.cookies

        response = self.client.post(
            self.review_url, data={"quality": 0}, content_type="application/json"
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not AyahRevision.objects.exists()

    def test_cookie_only_get_still_reads(self, django_user_model):
        django_user_model.objects.create_user(username="hafiz")
        self.client.get(reverse("user-me"), HTTP_X_USER_NAME="hafiz")

        response = self.client.get(reverse("user-me"))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["username"] == "hafiz"
