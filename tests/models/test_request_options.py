import pytest
from pydantic import ValidationError

from httpbridge.models import (
    DownloadOptions,
    RequestOptions,
    ResponseType,
    UploadOptions,
)


class TestResponseType:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("arraybuffer", ResponseType.ARRAY_BUFFER),
            ("BLOB", ResponseType.BLOB),
            ("Document", ResponseType.DOCUMENT),
            ("json", ResponseType.JSON),
            ("text", ResponseType.TEXT),
            ("", ResponseType.TEXT),
            ("xml", ResponseType.TEXT),
            (None, ResponseType.TEXT),
            (ResponseType.BLOB, ResponseType.BLOB),
        ],
    )
    def test_parse_or_default(self, value, expected):
        assert ResponseType.parse_or_default(value) is expected


class TestRequestOptions:
    def test_defaults(self):
        options = RequestOptions.model_validate({"url": "http://example.test"})

        assert options.method == "GET"
        assert options.headers == {}
        assert options.params == {}
        assert options.connect_timeout is None
        assert options.read_timeout is None
        assert options.disable_redirects is None
        assert options.should_encode_params is True
        assert options.response_type is ResponseType.TEXT
        assert options.data is None

    def test_camel_case_keys(self):
        options = RequestOptions.model_validate(
            {
                "url": "http://example.test",
                "method": "post",
                "connectTimeout": 100,
                "readTimeout": 0,
                "disableRedirects": True,
                "shouldEncodeUrlParams": False,
                "responseType": "JSON",
                "data": {"k": "v"},
            }
        )

        assert options.method == "POST"
        assert options.connect_timeout == 100
        assert options.read_timeout == 0
        assert options.disable_redirects is True
        assert options.should_encode_params is False
        assert options.response_type is ResponseType.JSON
        assert options.data == {"k": "v"}

    def test_field_names_are_accepted(self):
        options = RequestOptions(url="http://example.test", read_timeout=10)
        assert options.read_timeout == 10

    def test_header_and_param_values_are_stringified(self):
        options = RequestOptions.model_validate(
            {
                "url": "http://example.test",
                "headers": {"X-Count": 3, "X-Flag": True, "X-None": None},
                "params": {"n": 1, "flags": [True, False], "empty": []},
            }
        )

        assert options.headers == {"X-Count": "3", "X-Flag": "true", "X-None": "null"}
        assert options.params == {"n": "1", "flags": ["true", "false"], "empty": []}

    def test_nested_values_are_stringified_as_json(self):
        options = RequestOptions.model_validate(
            {
                "url": "http://example.test",
                "headers": {"X-Meta": {"a": 1}, "X-List": [1, "b"]},
                "params": {"filter": {"a": [1, 2]}, "items": [{"b": True}, "c"]},
            }
        )

        assert options.headers == {"X-Meta": '{"a":1}', "X-List": '[1,"b"]'}
        assert options.params == {
            "filter": '{"a":[1,2]}',
            "items": ['{"b":true}', "c"],
        }

    def test_null_collections_become_empty(self):
        options = RequestOptions.model_validate(
            {"url": "http://example.test", "headers": None, "params": None, "method": None}
        )
        assert options.headers == {}
        assert options.params == {}
        assert options.method == "GET"

    def test_negative_timeout_is_rejected(self):
        with pytest.raises(ValidationError):
            RequestOptions.model_validate(
                {"url": "http://example.test", "connectTimeout": -1}
            )

    def test_url_is_required(self):
        with pytest.raises(ValidationError):
            RequestOptions.model_validate({"method": "GET"})


class TestFileOptions:
    def test_download_defaults(self):
        options = DownloadOptions.model_validate(
            {"url": "http://example.test/f", "filePath": "f.bin"}
        )
        assert options.method == "GET"
        assert options.file_path == "f.bin"
        assert options.file_directory == "DOCUMENTS"

    def test_upload_defaults(self):
        options = UploadOptions.model_validate(
            {"url": "http://example.test/u", "filePath": "f.bin", "fileDirectory": "CACHE"}
        )
        assert options.method == "POST"
        assert options.file_directory == "CACHE"
        assert options.name == "file"

    def test_file_path_is_required(self):
        with pytest.raises(ValidationError):
            UploadOptions.model_validate({"url": "http://example.test/u"})
