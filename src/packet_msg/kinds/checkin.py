"""Check-in messages, sent by a station joining a net."""

from packet_msg.kinds.station import station_field_defs, station_type

TAG = "Check-In"

field_defs = station_field_defs()

message_type = station_type(TAG, "check-in message", field_defs)
