"""Unit tests for app spec YAML encoding and decoding."""

from collections.abc import Callable

import pytest
import yaml

from appspec import (
    AppSpec,
    DecodeError,
    EnvironmentDestinationSpec,
    EnvironmentSpec,
    MalformedVersionError,
    UnsupportedVersionError,
    decode,
    encode,
)

MakeEnvironment = Callable[..., EnvironmentSpec]


class TestDecode:
    def test_decodes_sample_document(self, sample_app_yaml: str) -> None:
        spec = decode(sample_app_yaml.encode())

        assert spec.name == "guestbook"
        assert spec.authors == ["alice@example.com"]
        registry = spec.get_registry_ref("incubator")
        assert registry is not None
        assert registry.git_version is not None
        assert registry.git_version.ref_spec == "master"
        environment = spec.get_environment_spec("default")
        assert environment is not None
        assert environment.kubernetes_version == "v1.8.0"
        assert environment.destination == EnvironmentDestinationSpec(
            server="https://127.0.0.1:6443", namespace="default"
        )
        assert spec.libraries["redis"].registry == "incubator"

    def test_accepts_text_input(self, sample_app_yaml: str) -> None:
        assert decode(sample_app_yaml).name == "guestbook"

    def test_absent_collections_are_empty(self) -> None:
        spec = decode(b"apiVersion: 0.1.0\nkind: ksonnet.io/app\n")

        assert spec.registries == {}
        assert spec.environments == {}
        assert spec.libraries == {}
        assert spec.contributors == []

    def test_ignores_unknown_fields(self) -> None:
        spec = decode(b"apiVersion: 0.1.0\nunknownField: 42\n")

        assert spec.api_version == "0.1.0"

    def test_decodes_contributors_and_repository(self) -> None:
        spec = decode(
            b"apiVersion: 0.1.0\n"
            b"contributors:\n"
            b"  - name: Alice\n"
            b"    email: alice@example.com\n"
            b"repository:\n"
            b"  type: git\n"
            b"  uri: https://github.com/example/guestbook\n"
        )

        assert spec.contributors[0].email == "alice@example.com"
        assert spec.repository is not None
        assert spec.repository.type == "git"

    def test_raises_decode_error_for_invalid_yaml(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode(b"apiVersion: [0.1.0\n")

        assert isinstance(exc_info.value.cause, yaml.YAMLError)
        assert exc_info.value.line is not None

    def test_raises_decode_error_for_non_mapping(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode(b"- a\n- b\n")

        assert "Expected YAML mapping" in str(exc_info.value)

    def test_raises_decode_error_for_type_mismatch(self) -> None:
        with pytest.raises(DecodeError):
            decode(b"apiVersion: 0.1.0\nregistries: [incubator]\n")

    def test_raises_decode_error_for_non_string_field(self) -> None:
        with pytest.raises(DecodeError):
            decode(b"apiVersion: 0.1.0\nenvironments:\n  dev:\n    k8sVersion: 1.8\n")

    def test_rejects_placeholder_version(self) -> None:
        with pytest.raises(UnsupportedVersionError):
            decode(b"apiVersion: 0.0.0\n")

    def test_rejects_missing_version(self) -> None:
        with pytest.raises(UnsupportedVersionError):
            decode(b"kind: ksonnet.io/app\n")

    def test_rejects_empty_document(self) -> None:
        with pytest.raises(UnsupportedVersionError):
            decode(b"")

    def test_rejects_newer_version(self) -> None:
        with pytest.raises(UnsupportedVersionError):
            decode(b"apiVersion: 0.2.0\n")

    def test_rejects_malformed_version(self) -> None:
        with pytest.raises(MalformedVersionError):
            decode(b"apiVersion: latest\n")

    def test_accepts_older_version(self) -> None:
        assert decode(b"apiVersion: 0.0.1\n").api_version == "0.0.1"


class TestEncode:
    def test_writes_camel_case_keys(self, make_environment: MakeEnvironment) -> None:
        spec = AppSpec.new("guestbook")
        spec.add_environment_spec(make_environment())

        content = encode(spec).decode()

        assert "apiVersion: 0.1.0" in content
        assert "k8sVersion: 1.8.0" in content
        assert "kubernetes_version" not in content

    def test_output_is_sorted_block_yaml(self) -> None:
        content = encode(AppSpec.new("guestbook")).decode()

        assert content.splitlines() == [
            "apiVersion: 0.1.0",
            "kind: ksonnet.io/app",
            "name: guestbook",
            "version: 0.0.1",
        ]

    def test_preserves_unicode(self) -> None:
        spec = AppSpec.new("guestbook")
        spec.description = "Gästebuch"

        assert "Gästebuch" in encode(spec).decode("utf-8")


class TestRoundTrip:
    def test_sample_document_survives_round_trip(self, sample_app_yaml: str) -> None:
        spec = decode(sample_app_yaml)

        assert decode(encode(spec)) == spec

    def test_added_environment_survives_round_trip(
        self, make_environment: MakeEnvironment
    ) -> None:
        spec = decode(
            b"apiVersion: 0.1.0\nregistries: {}\nenvironments: {}\n",
        )
        spec.add_environment_spec(make_environment())

        reloaded = decode(encode(spec))

        environment = reloaded.get_environment_spec("dev")
        assert environment is not None
        assert environment == make_environment()
