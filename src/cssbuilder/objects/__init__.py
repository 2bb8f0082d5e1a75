from cssbuilder.objects.json_bridge import deserialize, from_json, serialize, to_json
from cssbuilder.objects.rectangle import Rectangle

__all__ = ["Rectangle", "to_json", "from_json", "serialize", "deserialize"]
