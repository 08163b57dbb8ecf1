"""PyYAML loading and pass-through dumping helpers."""

import json

import yaml


class _Loader(yaml.SafeLoader):
    """Safe loader producing only null/dict/list/str/int/float/bool.

    Timestamps stay strings and mapping keys are coerced to strings.
    """

    def construct_mapping(self, node, deep=False):
        # Keys become strings before insertion, so 1/true/1.0 stay distinct
        if not isinstance(node, yaml.MappingNode):
            raise yaml.constructor.ConstructorError(
                None, None,
                f"expected a mapping node, but found {node.id}",
                node.start_mark,
            )
        self.flatten_mapping(node)
        mapping = {}
        for key_node, value_node in node.value:
            key = _key_str(self.construct_object(key_node, deep=deep))
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


_Loader.add_constructor(
    "tag:yaml.org,2002:timestamp",
    yaml.SafeLoader.construct_yaml_str,
)


def _key_str(key):
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


class _Dumper(yaml.SafeDumper):
    """YAML dumper: None as empty, proper list indent."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


_Dumper.add_representer(
    type(None),
    lambda d, _: d.represent_scalar("tag:yaml.org,2002:null", ""),
)


def load_document(text):
    return yaml.load(text, Loader=_Loader)


def _yaml(data):
    return yaml.dump(
        data,
        Dumper=_Dumper,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )


def _json(data):
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"
