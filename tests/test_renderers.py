import json

import yaml

from iam_actions.catalog import ResourceType
from iam_actions.renderers import render_actions, render_condition_keys, render_resource_details


def test_empty_action_list_renders_empty_in_both_modes() -> None:
    assert render_actions([], "svc", as_json=True) == "[]"
    assert render_actions([], "svc", as_json=False) == ""


def test_plain_mode_lists_unqualified_names_in_order() -> None:
    assert render_actions(["PutObject", "GetObject"], "s3", as_json=False) == "PutObject\nGetObject"


def test_json_mode_qualifies_names_and_keeps_order() -> None:
    names = ["PutObject", "GetObject", "ListBucket"]

    rendered = render_actions(names, "s3", as_json=True)

    assert json.loads(rendered) == [f"s3:{name}" for name in names]


def test_json_mode_escapes_unusual_characters() -> None:
    rendered = render_actions(['Get"Quoted"', "Back\\slash"], "svc", as_json=True)

    assert json.loads(rendered) == ['svc:Get"Quoted"', "svc:Back\\slash"]


def test_plain_and_json_modes_share_ordering() -> None:
    names = ["Zeta", "Alpha", "Mid"]

    plain = render_actions(names, "svc", as_json=False).splitlines()
    structured = [item.split(":", 1)[1] for item in json.loads(render_actions(names, "svc", as_json=True))]

    assert plain == structured == names


def test_condition_keys_are_not_qualified() -> None:
    keys = ["aws:RequestTag/${TagKey}", "s3:prefix"]

    assert json.loads(render_condition_keys(keys, as_json=True)) == keys
    assert render_condition_keys(keys, as_json=False) == "aws:RequestTag/${TagKey}\ns3:prefix"


def test_resource_details_render_raw_attributes() -> None:
    resources = [
        ResourceType.model_validate({"Name": "bucket", "ARNFormats": ["arn:${Partition}:s3:::${BucketName}"]}),
        ResourceType.model_validate({"Name": "object", "ARNFormats": ["arn:${Partition}:s3:::${BucketName}/${ObjectName}"]}),
    ]

    as_json = json.loads(render_resource_details(resources, as_json=True))
    as_yaml = yaml.safe_load(render_resource_details(resources, as_json=False))

    assert as_json == as_yaml
    assert [item["Name"] for item in as_json] == ["bucket", "object"]
    assert render_resource_details(resources, as_json=False).startswith("- Name: bucket")


def test_empty_resource_details() -> None:
    assert render_resource_details([], as_json=True) == "[]"
    assert render_resource_details([], as_json=False) == ""
