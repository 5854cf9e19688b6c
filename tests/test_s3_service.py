import unittest
from datetime import datetime, timezone
from unittest import mock

import boto3
from botocore.config import Config
from botocore.exceptions import EndpointConnectionError
from botocore.stub import Stubber
from pydantic import ValidationError

from photo_catalog.errors import ListingFailure
from photo_catalog.services import s3_service
from photo_catalog.services.s3_service import S3ListingClient

from tests.helpers import BUCKET, make_settings

STAMP = datetime(2021, 3, 5, tzinfo=timezone.utc)


def _client():
    return boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="x",
        aws_secret_access_key="y",
    )


class TestS3ListingClient(unittest.TestCase):
    def test_follows_continuation_tokens(self) -> None:
        client = _client()
        listing = S3ListingClient(client, BUCKET)
        with Stubber(client) as stubber:
            stubber.add_response(
                "list_objects_v2",
                {
                    "Contents": [{"Key": "a/", "Size": 0, "LastModified": STAMP}],
                    "IsTruncated": True,
                    "NextContinuationToken": "page-2",
                },
                expected_params={"Bucket": BUCKET, "Prefix": ""},
            )
            stubber.add_response(
                "list_objects_v2",
                {
                    "Contents": [{"Key": "a/_1.JPG", "Size": 2048, "LastModified": STAMP}],
                    "IsTruncated": False,
                },
                expected_params={"Bucket": BUCKET, "Prefix": "", "ContinuationToken": "page-2"},
            )
            records = listing.list_objects_sync()
            stubber.assert_no_pending_responses()

        self.assertEqual([r.key for r in records], ["a/", "a/_1.JPG"])
        self.assertEqual(records[1].size, 2048)
        self.assertEqual(records[1].last_modified, STAMP)

    def test_empty_prefix_listing(self) -> None:
        client = _client()
        listing = S3ListingClient(client, BUCKET)
        with Stubber(client) as stubber:
            stubber.add_response(
                "list_objects_v2",
                {"KeyCount": 0, "IsTruncated": False},
                expected_params={"Bucket": BUCKET, "Prefix": "missing/"},
            )
            records = listing.list_objects_sync("missing/")

        self.assertEqual(records, [])

    def test_client_error_becomes_listing_failure(self) -> None:
        client = _client()
        listing = S3ListingClient(client, BUCKET)
        with Stubber(client) as stubber:
            stubber.add_client_error(
                "list_objects_v2",
                service_error_code="AccessDenied",
                service_message="Access Denied",
                http_status_code=403,
            )
            with self.assertRaises(ListingFailure) as ctx:
                listing.list_objects_sync("a/")

        self.assertEqual(ctx.exception.prefix, "a/")
        self.assertEqual(ctx.exception.payload()["Code"], "AccessDenied")

    def test_from_settings_uses_bucket_and_profile(self) -> None:
        cfg = make_settings(AWS_PROFILE="photos")
        with mock.patch.object(s3_service.boto3.session, "Session") as session_cls:
            listing = S3ListingClient.from_settings(cfg)

        session_cls.assert_called_once_with(profile_name="photos", region_name="us-east-1")
        self.assertEqual(listing.bucket, BUCKET)
        self.assertIs(listing.client, session_cls.return_value.client.return_value)

    def test_client_config_carries_timeouts_and_retries(self) -> None:
        cfg = make_settings(S3_CONNECT_TIMEOUT_SECONDS=2, S3_READ_TIMEOUT_SECONDS=7, S3_MAX_ATTEMPTS=4)
        with mock.patch.object(s3_service.boto3.session, "Session") as session_cls:
            s3_service.build_s3_client(cfg)

        session_cls.assert_called_once_with(region_name="us-east-1")
        kwargs = session_cls.return_value.client.call_args.kwargs
        config = kwargs["config"]
        self.assertIsInstance(config, Config)
        self.assertEqual(config.connect_timeout, 2)
        self.assertEqual(config.read_timeout, 7)
        self.assertEqual(config.retries, {"max_attempts": 4, "mode": "standard"})
        self.assertEqual(config.signature_version, "s3v4")

    def test_retry_and_timeout_settings_are_bounded(self) -> None:
        for overrides in ({"S3_MAX_ATTEMPTS": 0}, {"S3_READ_TIMEOUT_SECONDS": 0}, {"DESCRIPTION_TIMEOUT_SECONDS": -1}):
            with self.subTest(**overrides):
                with self.assertRaises(ValidationError):
                    make_settings(**overrides)

    def test_connection_error_becomes_listing_failure(self) -> None:
        client = mock.MagicMock()
        client.get_paginator.return_value.paginate.side_effect = EndpointConnectionError(
            endpoint_url="https://s3.us-east-1.amazonaws.com/test-bucket"
        )
        listing = S3ListingClient(client, BUCKET)

        with self.assertRaises(ListingFailure) as ctx:
            listing.list_objects_sync()

        self.assertIsInstance(ctx.exception.payload(), str)
        self.assertIn("Could not connect", ctx.exception.payload())


class TestS3ListingClientAsync(unittest.IsolatedAsyncioTestCase):
    async def test_list_objects_runs_off_loop(self) -> None:
        client = _client()
        listing = S3ListingClient(client, BUCKET)
        with Stubber(client) as stubber:
            stubber.add_response(
                "list_objects_v2",
                {"Contents": [{"Key": "background/_s.JPG", "Size": 1, "LastModified": STAMP}]},
                expected_params={"Bucket": BUCKET, "Prefix": "background/_"},
            )
            records = await listing.list_objects("background/_")

        self.assertEqual([r.key for r in records], ["background/_s.JPG"])


if __name__ == "__main__":
    unittest.main()
