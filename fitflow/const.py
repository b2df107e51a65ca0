# Seconds between the FIT epoch (1989-12-31T00:00:00Z) and the Unix epoch
FIT_UNIX_TS_DIFF = 631065600

FIT_DATA_TYPE = b'.FIT'
VALID_HEADER_SIZES = (12, 14)
FILE_CRC_SIZE = 2
LOCAL_MESSAGE_SLOTS = 16

# Record header bit layout
COMPRESSED_HEADER_MASK = 0x80
DEFINITION_MASK = 0x40
DEVELOPER_DATA_MASK = 0x20
LOCAL_MESSAGE_TYPE_MASK = 0x0F

TIMESTAMP_FIELD_NUMBER = 253

# date_time values below this are seconds since device power-on, not absolute times
DATE_TIME_MIN = 0x10000000

# Global message numbers with special handling
HR_MESG_NUM = 132
FIELD_DESCRIPTION_MESG_NUM = 206

RECORD_MESSAGE = 'record'
DEVELOPER_DATA_MESSAGE = 'developer_data'

# Messages decoded without invalid-value checks (raw byte streams)
SENTINEL_EXEMPT_MESSAGES = frozenset({HR_MESG_NUM})

# date_time fields other than field 253 that carry FIT epoch seconds
DATE_TIME_FIELDS = (
    ('activity', 'local_timestamp'),
    ('course_point', 'timestamp'),
    ('file_id', 'time_created'),
    ('goal', 'end_date'),
    ('goal', 'start_date'),
    ('lap', 'start_time'),
    ('length', 'start_time'),
    ('monitoring', 'local_timestamp'),
    ('monitoring_info', 'local_timestamp'),
    ('obdii_data', 'start_timestamp'),
    ('schedule', 'scheduled_time'),
    ('schedule', 'time_created'),
    ('segment_lap', 'start_time'),
    ('session', 'start_time'),
    ('timestamp_correlation', 'local_timestamp'),
    ('timestamp_correlation', 'system_timestamp'),
    ('training_file', 'time_created'),
    ('video_clip', 'end_timestamp'),
    ('video_clip', 'start_timestamp'),
)

# Unit conversion factors
SEMICIRCLES_TO_DEGREES = 180.0 / 2 ** 31
METERS_TO_KILOMETERS = 0.001
METERS_TO_MILES = 0.000621371192
METERS_TO_FEET = 3.2808399
MPS_TO_KPH = 3.6
MPS_TO_MPH = 2.23693629

UNIT_MESSAGES = ('session', 'lap', 'record', 'segment_lap')

TEMPERATURE_FIELDS = ('avg_temperature', 'max_temperature', 'temperature')
DISTANCE_FIELDS = ('distance', 'total_distance')
ALTITUDE_FIELDS = (
    'altitude', 'avg_altitude', 'enhanced_avg_altitude', 'enhanced_max_altitude',
    'enhanced_min_altitude', 'max_altitude', 'min_altitude', 'total_ascent', 'total_descent',
)
SPEED_FIELDS = (
    'avg_neg_vertical_speed', 'avg_pos_vertical_speed', 'avg_speed', 'enhanced_avg_speed',
    'enhanced_max_speed', 'enhanced_speed', 'max_neg_vertical_speed', 'max_pos_vertical_speed',
    'max_speed', 'speed',
)
POSITION_FIELDS = (
    'end_position_lat', 'end_position_long', 'nec_lat', 'nec_long', 'position_lat',
    'position_long', 'start_position_lat', 'start_position_long', 'swc_lat', 'swc_long',
)
