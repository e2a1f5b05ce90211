"""
Example: building request bodies with tri-state optional fields.

This shows the difference between the three states of a nullable field:
- never set: the key is left out, the server keeps its current value
- explicit null: the key is sent as null, the server clears the value
- value: the key is sent with the new value
"""

from webhook_models.models import EventTypeUpdate


# =============================================================================
# Example 1: update the description only
# =============================================================================
update = EventTypeUpdate(description="A user signed up")
print(update.to_json())
# {"archived":false,"description":"A user signed up"}


# =============================================================================
# Example 2: put the event type behind a feature flag
# =============================================================================
update.set("featureFlag", "beta-signups")
print(update.to_json())
# {"archived":false,"description":"A user signed up","featureFlag":"beta-signups"}


# =============================================================================
# Example 3: remove the feature flag on the server
# =============================================================================
update.set_nil("featureFlag")
print(update.to_json())
# {"archived":false,"description":"A user signed up","featureFlag":null}


# =============================================================================
# Example 4: parse a response and inspect what the server actually sent
# =============================================================================
received = EventTypeUpdate.from_json(b'{"description":"d","featureFlag":null}')
value, present = received.get_ok("featureFlag")
print(f"featureFlag present={present} value={value!r}")
# featureFlag present=True value=None
print(f"archived present={received.has('archived')}")
# archived present=False
