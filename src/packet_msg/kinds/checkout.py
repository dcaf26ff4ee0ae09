"""Check-out messages, sent by a station leaving a net."""

from packet_msg.kinds.station import station_field_defs, station_type

TAG = "Check-Out"

field_defs = station_field_defs()

message_type = station_type(TAG, "check-out message", field_defs)
