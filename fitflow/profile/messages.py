#!/usr/bin/env python3
"""
Global FIT profile - message and field metadata keyed by global message number.

Scale/Offset: when specified, the binary quantity is divided by the scale
factor and then the offset is subtracted, yielding a floating point quantity.
Tuples are (field_name, scale, offset, units).
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class FieldProfile:
    """Catalog metadata for one field of a message"""
    number: int
    name: str
    scale: Number = 1
    offset: Number = 0
    units: str = ''


@dataclass(frozen=True)
class MessageProfile:
    """Catalog entry for one global message number"""
    number: int
    name: str
    fields: Mapping[int, FieldProfile]

    def field(self, field_number: int) -> Optional[FieldProfile]:
        return self.fields.get(field_number)



_MESSAGES: Dict[int, Tuple[str, Dict[int, Tuple[str, Number, Number, str]]]] = {
    0: ('file_id', {
        0: ('type', 1, 0, ''),
        1: ('manufacturer', 1, 0, ''),
        2: ('product', 1, 0, ''),
        3: ('serial_number', 1, 0, ''),
        4: ('time_created', 1, 0, ''),
        5: ('number', 1, 0, ''),
    }),
    2: ('device_settings', {
        0: ('active_time_zone', 1, 0, ''),
        1: ('utc_offset', 1, 0, ''),
        5: ('time_zone_offset', 4, 0, 'hr'),
    }),
    3: ('user_profile', {
        0: ('friendly_name', 1, 0, ''),
        1: ('gender', 1, 0, ''),
        2: ('age', 1, 0, 'years'),
        3: ('height', 100, 0, 'm'),
        4: ('weight', 10, 0, 'kg'),
        5: ('language', 1, 0, ''),
        6: ('elev_setting', 1, 0, ''),
        7: ('weight_setting', 1, 0, ''),
        8: ('resting_heart_rate', 1, 0, 'bpm'),
        10: ('default_max_biking_heart_rate', 1, 0, 'bpm'),
        11: ('default_max_heart_rate', 1, 0, 'bpm'),
        12: ('hr_setting', 1, 0, ''),
        13: ('speed_setting', 1, 0, ''),
        14: ('dist_setting', 1, 0, ''),
        16: ('power_setting', 1, 0, ''),
        17: ('activity_class', 1, 0, ''),
        18: ('position_setting', 1, 0, ''),
        21: ('temperature_setting', 1, 0, ''),
    }),
    7: ('zones_target', {
        1: ('max_heart_rate', 1, 0, ''),
        2: ('threshold_heart_rate', 1, 0, ''),
        3: ('functional_threshold_power', 1, 0, ''),
        5: ('hr_calc_type', 1, 0, ''),
        7: ('pwr_calc_type', 1, 0, ''),
    }),
    12: ('sport', {
        0: ('sport', 1, 0, ''),
        1: ('sub_sport', 1, 0, ''),
        3: ('name', 1, 0, ''),
    }),
    18: ('session', {
        0: ('event', 1, 0, ''),
        1: ('event_type', 1, 0, ''),
        2: ('start_time', 1, 0, ''),
        3: ('start_position_lat', 1, 0, 'semicircles'),
        4: ('start_position_long', 1, 0, 'semicircles'),
        5: ('sport', 1, 0, 'semicircles'),
        6: ('sub_sport', 1, 0, ''),
        7: ('total_elapsed_time', 1000, 0, 's'),
        8: ('total_timer_time', 1000, 0, 's'),
        9: ('total_distance', 100, 0, 'm'),
        10: ('total_cycles', 1, 0, 'cycles'),
        11: ('total_calories', 1, 0, 'kcal'),
        13: ('total_fat_calories', 1, 0, 'kcal'),
        14: ('avg_speed', 1000, 0, 'm/s'),
        15: ('max_speed', 1000, 0, 'm/s'),
        16: ('avg_heart_rate', 1, 0, 'bpm'),
        17: ('max_heart_rate', 1, 0, 'bpm'),
        18: ('avg_cadence', 1, 0, 'rpm'),
        19: ('max_cadence', 1, 0, 'rpm'),
        20: ('avg_power', 1, 0, 'watts'),
        21: ('max_power', 1, 0, 'watts'),
        22: ('total_ascent', 1, 0, 'm'),
        23: ('total_descent', 1, 0, 'm'),
        24: ('total_training_effect', 10, 0, ''),
        25: ('first_lap_index', 1, 0, ''),
        26: ('num_laps', 1, 0, ''),
        27: ('event_group', 1, 0, ''),
        28: ('trigger', 1, 0, ''),
        29: ('nec_lat', 1, 0, 'semicircles'),
        30: ('nec_long', 1, 0, 'semicircles'),
        31: ('swc_lat', 1, 0, 'semicircles'),
        32: ('swc_long', 1, 0, 'semicircles'),
        34: ('normalized_power', 1, 0, 'watts'),
        35: ('training_stress_score', 10, 0, 'tss'),
        36: ('intensity_factor', 1000, 0, 'if'),
        37: ('left_right_balance', 1, 0, ''),
        41: ('avg_stroke_count', 10, 0, 'strokes/lap'),
        42: ('avg_stroke_distance', 100, 0, 'm'),
        43: ('swim_stroke', 1, 0, 'swim_stroke'),
        44: ('pool_length', 100, 0, 'm'),
        45: ('threshold_power', 1, 0, 'watts'),
        46: ('pool_length_unit', 1, 0, ''),
        47: ('num_active_lengths', 1, 0, 'lengths'),
        48: ('total_work', 1, 0, 'J'),
        65: ('time_in_hr_zone', 1000, 0, 's'),
        68: ('time_in_power_zone', 1000, 0, 's'),
        89: ('avg_vertical_oscillation', 10, 0, 'mm'),
        90: ('avg_stance_time_percent', 100, 0, 'percent'),
        91: ('avg_stance_time', 10, 0, 'ms'),
        92: ('avg_fractional_cadence', 128, 0, 'rpm'),
        93: ('max_fractional_cadence', 128, 0, 'rpm'),
        94: ('total_fractional_cycles', 128, 0, 'cycles'),
        101: ('avg_left_torque_effectiveness', 2, 0, 'percent'),
        102: ('avg_right_torque_effectiveness', 2, 0, 'percent'),
        103: ('avg_left_pedal_smoothness', 2, 0, 'percent'),
        104: ('avg_right_pedal_smoothness', 2, 0, 'percent'),
        105: ('avg_combined_pedal_smoothness', 2, 0, 'percent'),
        111: ('sport_index', 1, 0, ''),
        112: ('time_standing', 1000, 0, 's'),
        113: ('stand_count', 1, 0, ''),
        114: ('avg_left_pco', 1, 0, 'mm'),
        115: ('avg_right_pco', 1, 0, 'mm'),
        116: ('avg_left_power_phase', 0.7111111, 0, 'degrees'),
        117: ('avg_left_power_phase_peak', 0.7111111, 0, 'degrees'),
        118: ('avg_right_power_phase', 0.7111111, 0, 'degrees'),
        119: ('avg_right_power_phase_peak', 0.7111111, 0, 'degrees'),
        120: ('avg_power_position', 1, 0, 'watts'),
        121: ('max_power_position', 1, 0, 'watts'),
        122: ('avg_cadence_position', 1, 0, 'rpm'),
        123: ('max_cadence_position', 1, 0, 'rpm'),
        253: ('timestamp', 1, 0, 's'),
        254: ('message_index', 1, 0, ''),
    }),
    19: ('lap', {
        0: ('event', 1, 0, ''),
        1: ('event_type', 1, 0, ''),
        2: ('start_time', 1, 0, ''),
        3: ('start_position_lat', 1, 0, 'semicircles'),
        4: ('start_position_long', 1, 0, 'semicircles'),
        5: ('end_position_lat', 1, 0, 'semicircles'),
        6: ('end_position_long', 1, 0, 'semicircles'),
        7: ('total_elapsed_time', 1000, 0, 's'),
        8: ('total_timer_time', 1000, 0, 's'),
        9: ('total_distance', 100, 0, 'm'),
        10: ('total_cycles', 1, 0, 'cycles'),
        11: ('total_calories', 1, 0, 'kcal'),
        12: ('total_fat_calories', 1, 0, 'kcal'),
        13: ('avg_speed', 1000, 0, 'm/s'),
        14: ('max_speed', 1000, 0, 'm/s'),
        15: ('avg_heart_rate', 1, 0, 'bpm'),
        16: ('max_heart_rate', 1, 0, 'bpm'),
        17: ('avg_cadence', 1, 0, 'rpm'),
        18: ('max_cadence', 1, 0, 'rpm'),
        19: ('avg_power', 1, 0, 'watts'),
        20: ('max_power', 1, 0, 'watts'),
        21: ('total_ascent', 1, 0, 'm'),
        22: ('total_descent', 1, 0, 'm'),
        23: ('intensity', 1, 0, ''),
        24: ('lap_trigger', 1, 0, ''),
        25: ('sport', 1, 0, ''),
        26: ('event_group', 1, 0, ''),
        32: ('num_lengths', 1, 0, 'lengths'),
        33: ('normalized_power', 1, 0, 'watts'),
        34: ('left_right_balance', 1, 0, ''),
        35: ('first_length_index', 1, 0, ''),
        37: ('avg_stroke_distance', 100, 0, 'm'),
        38: ('swim_stroke', 1, 0, ''),
        39: ('sub_sport', 1, 0, ''),
        40: ('num_active_lengths', 1, 0, 'lengths'),
        41: ('total_work', 1, 0, 'J'),
        57: ('time_in_hr_zone', 1000, 0, 's'),
        60: ('time_in_power_zone', 1000, 0, 's'),
        71: ('wkt_step_index', 1, 0, ''),
        77: ('avg_vertical_oscillation', 10, 0, 'mm'),
        78: ('avg_stance_time_percent', 100, 0, 'percent'),
        79: ('avg_stance_time', 10, 0, 'ms'),
        80: ('avg_fractional_cadence', 128, 0, 'rpm'),
        81: ('max_fractional_cadence', 128, 0, 'rpm'),
        82: ('total_fractional_cycles', 128, 0, 'cycles'),
        91: ('avg_left_torque_effectiveness', 2, 0, 'percent'),
        92: ('avg_right_torque_effectiveness', 2, 0, 'percent'),
        93: ('avg_left_pedal_smoothness', 2, 0, 'percent'),
        94: ('avg_right_pedal_smoothness', 2, 0, 'percent'),
        95: ('avg_combined_pedal_smoothness', 2, 0, 'percent'),
        98: ('time_standing', 1000, 0, 's'),
        99: ('stand_count', 1, 0, ''),
        100: ('avg_left_pco', 1, 0, 'mm'),
        101: ('avg_right_pco', 1, 0, 'mm'),
        102: ('avg_left_power_phase', 0.7111111, 0, 'degrees'),
        103: ('avg_left_power_phase_peak', 0.7111111, 0, 'degrees'),
        104: ('avg_right_power_phase', 0.7111111, 0, 'degrees'),
        105: ('avg_right_power_phase_peak', 0.7111111, 0, 'degrees'),
        106: ('avg_power_position', 1, 0, 'watts'),
        107: ('max_power_position', 1, 0, 'watts'),
        108: ('avg_cadence_position', 1, 0, 'rpm'),
        109: ('max_cadence_position', 1, 0, 'rpm'),
        253: ('timestamp', 1, 0, 's'),
        254: ('message_index', 1, 0, ''),
    }),
    20: ('record', {
        0: ('position_lat', 1, 0, 'semicircles'),
        1: ('position_long', 1, 0, 'semicircles'),
        2: ('altitude', 5, 500, 'm'),
        3: ('heart_rate', 1, 0, 'bpm'),
        4: ('cadence', 1, 0, 'rpm'),
        5: ('distance', 100, 0, 'm'),
        6: ('speed', 1000, 0, 'm/s'),
        7: ('power', 1, 0, 'watts'),
        8: ('compressed_speed_distance', 100, 0, 'm/s,m'),
        9: ('grade', 100, 0, 'percent'),
        10: ('resistance', 1, 0, ''),
        11: ('time_from_course', 1000, 0, 's'),
        12: ('cycle_length', 100, 0, 'm'),
        13: ('temperature', 1, 0, 'C'),
        17: ('speed_1s', 16, 0, 'm/s'),
        18: ('cycles', 1, 0, 'cycles'),
        19: ('total_cycles', 1, 0, 'cycles'),
        28: ('compressed_accumulated_power', 1, 0, 'watts'),
        29: ('accumulated_power', 1, 0, 'watts'),
        30: ('left_right_balance', 1, 0, ''),
        31: ('gps_accuracy', 1, 0, 'm'),
        32: ('vertical_speed', 1000, 0, 'm/s'),
        33: ('calories', 1, 0, 'kcal'),
        39: ('vertical_oscillation', 10, 0, 'mm'),
        40: ('stance_time_percent', 100, 0, 'percent'),
        41: ('stance_time', 10, 0, 'ms'),
        42: ('activity_type', 1, 0, ''),
        43: ('left_torque_effectiveness', 2, 0, 'percent'),
        44: ('right_torque_effectiveness', 2, 0, 'percent'),
        45: ('left_pedal_smoothness', 2, 0, 'percent'),
        46: ('right_pedal_smoothness', 2, 0, 'percent'),
        47: ('combined_pedal_smoothness', 2, 0, 'percent'),
        48: ('time128', 128, 0, 's'),
        49: ('stroke_type', 1, 0, ''),
        50: ('zone', 1, 0, ''),
        51: ('ball_speed', 100, 0, 'm/s'),
        52: ('cadence256', 256, 0, 'rpm'),
        53: ('fractional_cadence', 128, 0, 'rpm'),
        54: ('total_hemoglobin_conc', 100, 0, 'g/dL'),
        55: ('total_hemoglobin_conc_min', 100, 0, 'g/dL'),
        56: ('total_hemoglobin_conc_max', 100, 0, 'g/dL'),
        57: ('saturated_hemoglobin_percent', 10, 0, '%'),
        58: ('saturated_hemoglobin_percent_min', 10, 0, '%'),
        59: ('saturated_hemoglobin_percent_max', 10, 0, '%'),
        62: ('device_index', 1, 0, ''),
        67: ('left_pco', 1, 0, 'mm'),
        68: ('right_pco', 1, 0, 'mm'),
        69: ('left_power_phase', 0.7111111, 0, 'degrees'),
        70: ('left_power_phase_peak', 0.7111111, 0, 'degrees'),
        71: ('right_power_phase', 0.7111111, 0, 'degrees'),
        72: ('right_power_phase_peak', 0.7111111, 0, 'degrees'),
        73: ('enhanced_speed', 1000, 0, 'm/s'),
        78: ('enhanced_altitude', 5, 500, 'm'),
        81: ('battery_soc', 2, 0, 'percent'),
        82: ('motor_power', 1, 0, 'watts'),
        83: ('vertical_ratio', 100, 0, 'percent'),
        84: ('stance_time_balance', 100, 0, 'percent'),
        85: ('step_length', 10, 0, 'mm'),
        253: ('timestamp', 1, 0, 's'),
    }),
    21: ('event', {
        0: ('event', 1, 0, ''),
        1: ('event_type', 1, 0, ''),
        3: ('data', 1, 0, ''),
        4: ('event_group', 1, 0, ''),
        253: ('timestamp', 1, 0, 's'),
    }),
    23: ('device_info', {
        0: ('device_index', 1, 0, ''),
        1: ('device_type', 1, 0, ''),
        2: ('manufacturer', 1, 0, ''),
        3: ('serial_number', 1, 0, ''),
        4: ('product', 1, 0, ''),
        5: ('software_version', 1, 0, ''),
        6: ('hardware_version', 1, 0, ''),
        7: ('cum_operating_time', 1, 0, ''),
        10: ('battery_voltage', 1, 0, ''),
        11: ('battery_status', 1, 0, ''),
        20: ('ant_transmission_type', 1, 0, ''),
        21: ('ant_device_number', 1, 0, ''),
        22: ('ant_network', 1, 0, ''),
        25: ('source_type', 1, 0, ''),
        253: ('timestamp', 1, 0, 's'),
    }),
    34: ('activity', {
        0: ('total_timer_time', 1000, 0, 's'),
        1: ('num_sessions', 1, 0, ''),
        2: ('type', 1, 0, ''),
        3: ('event', 1, 0, ''),
        4: ('event_type', 1, 0, ''),
        5: ('local_timestamp', 1, 0, ''),
        6: ('event_group', 1, 0, ''),
        253: ('timestamp', 1, 0, 's'),
    }),
    49: ('file_creator', {
        0: ('software_version', 1, 0, ''),
        1: ('hardware_version', 1, 0, ''),
    }),
    78: ('hrv', {
        0: ('time', 1000, 0, 's'),
    }),
    101: ('length', {
        0: ('event', 1, 0, ''),
        1: ('event_type', 1, 0, ''),
        2: ('start_time', 1, 0, ''),
        3: ('total_elapsed_time', 1000, 0, 's'),
        4: ('total_timer_time', 1000, 0, 's'),
        5: ('total_strokes', 1, 0, 'strokes'),
        6: ('avg_speed', 1000, 0, 'm/s'),
        7: ('swim_stroke', 1, 0, 'swim_stroke'),
        9: ('avg_swimming_cadence', 1, 0, 'strokes/min'),
        10: ('event_group', 1, 0, ''),
        11: ('total_calories', 1, 0, 'kcal'),
        12: ('length_type', 1, 0, ''),
        253: ('timestamp', 1, 0, 's'),
        254: ('message_index', 1, 0, ''),
    }),
    132: ('hr', {
        0: ('fractional_timestamp', 32768, 0, 's'),
        1: ('time256', 256, 0, 's'),
        6: ('filtered_bpm', 1, 0, 'bpm'),
        9: ('event_timestamp', 1, 0, 's'),
        10: ('event_timestamp_12', 1, 0, 's'),
        253: ('timestamp', 1, 0, 's'),
    }),
    142: ('segment_lap', {
        0: ('event', 1, 0, ''),
        1: ('event_type', 1, 0, ''),
        2: ('start_time', 1, 0, ''),
        3: ('start_position_lat', 1, 0, 'semicircles'),
        4: ('start_position_long', 1, 0, 'semicircles'),
        5: ('end_position_lat', 1, 0, 'semicircles'),
        6: ('end_position_long', 1, 0, 'semicircles'),
        7: ('total_elapsed_time', 1000, 0, 's'),
        8: ('total_timer_time', 1000, 0, 's'),
        9: ('total_distance', 100, 0, 'm'),
        10: ('total_cycles', 1, 0, 'cycles'),
        11: ('total_calories', 1, 0, 'kcal'),
        12: ('total_fat_calories', 1, 0, 'kcal'),
        13: ('avg_speed', 1000, 0, 'm/s'),
        14: ('max_speed', 1000, 0, 'm/s'),
        15: ('avg_heart_rate', 1, 0, 'bpm'),
        16: ('max_heart_rate', 1, 0, 'bpm'),
        17: ('avg_cadence', 1, 0, 'rpm'),
        18: ('max_cadence', 1, 0, 'rpm'),
        19: ('avg_power', 1, 0, 'watts'),
        20: ('max_power', 1, 0, 'watts'),
        21: ('total_ascent', 1, 0, 'm'),
        22: ('total_descent', 1, 0, 'm'),
        23: ('sport', 1, 0, ''),
        24: ('event_group', 1, 0, ''),
        25: ('nec_lat', 1, 0, 'semicircles'),
        26: ('nec_long', 1, 0, 'semicircles'),
        27: ('swc_lat', 1, 0, 'semicircles'),
        28: ('swc_long', 1, 0, 'semicircles'),
        29: ('name', 1, 0, ''),
        30: ('normalized_power', 1, 0, 'watts'),
        31: ('left_right_balance', 1, 0, ''),
        32: ('sub_sport', 1, 0, ''),
        33: ('total_work', 1, 0, 'J'),
        58: ('sport_event', 1, 0, ''),
        59: ('avg_left_torque_effectiveness', 2, 0, 'percent'),
        60: ('avg_right_torque_effectiveness', 2, 0, 'percent'),
        61: ('avg_left_pedal_smoothness', 2, 0, 'percent'),
        62: ('avg_right_pedal_smoothness', 2, 0, 'percent'),
        63: ('avg_combined_pedal_smoothness', 2, 0, 'percent'),
        64: ('status', 1, 0, ''),
        65: ('uuid', 1, 0, ''),
        66: ('avg_fractional_cadence', 128, 0, 'rpm'),
        67: ('max_fractional_cadence', 128, 0, 'rpm'),
        68: ('total_fractional_cycles', 128, 0, 'cycles'),
        69: ('front_gear_shift_count', 1, 0, ''),
        70: ('rear_gear_shift_count', 1, 0, ''),
        71: ('time_standing', 1000, 0, 's'),
        72: ('stand_count', 1, 0, ''),
        73: ('avg_left_pco', 1, 0, 'mm'),
        74: ('avg_right_pco', 1, 0, 'mm'),
        75: ('avg_left_power_phase', 0.7111111, 0, 'degrees'),
        76: ('avg_left_power_phase_peak', 0.7111111, 0, 'degrees'),
        77: ('avg_right_power_phase', 0.7111111, 0, 'degrees'),
        78: ('avg_right_power_phase_peak', 0.7111111, 0, 'degrees'),
        79: ('avg_power_position', 1, 0, 'watts'),
        80: ('max_power_position', 1, 0, 'watts'),
        81: ('avg_cadence_position', 1, 0, 'rpm'),
        82: ('max_cadence_position', 1, 0, 'rpm'),
        253: ('timestamp', 1, 0, 's'),
        254: ('message_index', 1, 0, ''),
    }),
    206: ('field_description', {
        0: ('developer_data_index', 1, 0, ''),
        1: ('field_definition_number', 1, 0, ''),
        2: ('fit_base_type_id', 1, 0, ''),
        3: ('field_name', 1, 0, ''),
        4: ('array', 1, 0, ''),
        5: ('components', 1, 0, ''),
        6: ('scale', 1, 0, ''),
        7: ('offset', 1, 0, ''),
        8: ('units', 1, 0, ''),
        9: ('bits', 1, 0, ''),
        10: ('accumulate', 1, 0, ''),
        13: ('fit_base_unit_id', 1, 0, ''),
        14: ('native_mesg_num', 1, 0, ''),
        15: ('native_field_num', 1, 0, ''),
    }),
    207: ('developer_data_id', {
        0: ('developer_id', 1, 0, ''),
        1: ('application_id', 1, 0, ''),
        2: ('manufacturer_id', 1, 0, ''),
        3: ('developer_data_index', 1, 0, ''),
        4: ('application_version', 1, 0, ''),
    }),
    258: ('dive_settings', {
        0: ('name', 1, 0, ''),
        1: ('model', 1, 0, ''),
        2: ('gf_low', 1, 0, 'percent'),
        3: ('gf_high', 1, 0, 'percent'),
        4: ('water_type', 1, 0, ''),
        5: ('water_density', 1, 0, 'kg/m^3'),
        6: ('po2_warn', 100, 0, 'percent'),
        7: ('po2_critical', 100, 0, 'percent'),
        8: ('po2_deco', 100, 0, 'percent'),
        9: ('safety_stop_enabled', 1, 0, ''),
        10: ('bottom_depth', 1, 0, ''),
        11: ('bottom_time', 1, 0, ''),
        12: ('apnea_countdown_enabled', 1, 0, ''),
        13: ('apnea_countdown_time', 1, 0, ''),
        14: ('backlight_mode', 1, 0, ''),
        15: ('backlight_brightness', 1, 0, ''),
        16: ('backlight_timeout', 1, 0, ''),
        17: ('repeat_dive_interval', 1, 0, 's'),
        18: ('safety_stop_time', 1, 0, 's'),
        19: ('heart_rate_source_type', 1, 0, ''),
        20: ('heart_rate_source', 1, 0, ''),
        254: ('message_index', 1, 0, ''),
    }),
    259: ('dive_gas', {
        0: ('helium_content', 1, 0, 'percent'),
        1: ('oxygen_content', 1, 0, 'percent'),
        2: ('status', 1, 0, ''),
        254: ('message_index', 1, 0, ''),
    }),
    262: ('dive_alarm', {
        0: ('depth', 1000, 0, 'm'),
        1: ('time', 1, 0, 's'),
        2: ('enabled', 1, 0, ''),
        3: ('alarm_type', 1, 0, ''),
        4: ('sound', 1, 0, ''),
        254: ('message_index', 1, 0, ''),
    }),
    268: ('dive_summary', {
        0: ('reference_mesg', 1, 0, ''),
        1: ('reference_index', 1, 0, ''),
        2: ('avg_depth', 1000, 0, 'm'),
        3: ('max_depth', 1000, 0, 'm'),
        4: ('surface_interval', 1, 0, 's'),
        5: ('start_cns', 1, 0, 'percent'),
        6: ('end_cns', 1, 0, 'percent'),
        7: ('start_n2', 1, 0, 'percent'),
        8: ('end_n2', 1, 0, 'percent'),
        9: ('o2_toxicity', 1, 0, 'OTUs'),
        10: ('dive_number', 1, 0, ''),
        11: ('bottom_time', 1000, 0, 's'),
        253: ('timestamp', 1, 0, 's'),
    }),
}


def _build_profile() -> Mapping[int, MessageProfile]:
    profile = {}
    for mesg_num, (mesg_name, field_defns) in _MESSAGES.items():
        fields = {
            field_num: FieldProfile(field_num, name, scale, offset, units)
            for field_num, (name, scale, offset, units) in field_defns.items()
        }
        profile[mesg_num] = MessageProfile(mesg_num, mesg_name, MappingProxyType(fields))
    return MappingProxyType(profile)


MESSAGE_PROFILE: Mapping[int, MessageProfile] = _build_profile()
MESSAGE_NUMBERS: Mapping[str, int] = MappingProxyType(
    {mesg.name: mesg_num for mesg_num, mesg in MESSAGE_PROFILE.items()}
)


def get_message_profile(global_message_number: int) -> Optional[MessageProfile]:
    """Catalog entry for a global message number, None for unknown messages"""
    return MESSAGE_PROFILE.get(global_message_number)


def get_message_profile_by_name(name: str) -> Optional[MessageProfile]:
    mesg_num = MESSAGE_NUMBERS.get(name)
    return None if mesg_num is None else MESSAGE_PROFILE[mesg_num]
