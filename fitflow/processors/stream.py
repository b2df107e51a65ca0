#!/usr/bin/env python3
"""
Message Stream Decoder - walks the record stream of a FIT file.

Definition records bind a wire layout to one of 16 local message slots,
replacing whatever occupied the slot before; data records are decoded
against the layout currently held by their slot. Every definition is also
kept in an append-only history used later by the repair pipeline.
"""
import struct
from typing import Any, Dict, List, Optional, Tuple

from ..const import (
    COMPRESSED_HEADER_MASK, DEFINITION_MASK, DEVELOPER_DATA_MASK, LOCAL_MESSAGE_TYPE_MASK,
    LOCAL_MESSAGE_SLOTS, FIELD_DESCRIPTION_MESG_NUM, RECORD_MESSAGE, SENTINEL_EXEMPT_MESSAGES,
)
from ..exceptions import malformed_record, truncated_stream, undefined_message, unsupported_header_variant
from ..profile import ByteOrder, MessageProfile, get_message_profile
from ..utils import get_logger
from .fields import FieldDecoder
from .interface import (
    DefinitionMessage, DeveloperField, DeveloperFieldDefinition, DeveloperFieldDescription,
    FieldDefinition, FileHeader, RawDecodeResult,
)


logger = get_logger(__name__)


class MessageStreamDecoder:
    """Decodes every record between the file header and the file CRC"""

    def __init__(self, data: bytes, header: FileHeader,
                 garmin_timestamps: bool = False,
                 overwrite_with_dev_data: bool = False):
        self.data = data
        self.header = header
        self.position = header.header_size
        self.end = header.data_end
        self.overwrite_with_dev_data = overwrite_with_dev_data

        self.slots: List[Optional[DefinitionMessage]] = [None] * LOCAL_MESSAGE_SLOTS
        self.history: List[DefinitionMessage] = []
        self.developer_descriptions: Dict[Tuple[int, int], DeveloperFieldDescription] = {}
        self.field_decoder = FieldDecoder(garmin_timestamps)

        self.result = RawDecodeResult(header=header, garmin_timestamps=garmin_timestamps)
        self._sequence: Dict[str, int] = {}
        self._max_timestamp: Optional[int] = None
        self._skipped = 0

    def decode(self) -> RawDecodeResult:
        """
        Run the cursor loop to the end of the data region.

        Raises:
            UnsupportedHeaderVariantError: compressed-timestamp record header
            MalformedRecordError: bad architecture byte in a definition
            UndefinedMessageError: data record for an unassigned slot
            TruncatedStreamError: record running past the data region
        """
        while self.position < self.end:
            record_header = self._take(1)[0]
            if record_header & COMPRESSED_HEADER_MASK:
                raise unsupported_header_variant(
                    "Compressed timestamp headers are not supported",
                    position=self.position - 1,
                    record_header=record_header,
                )

            local_message_type = record_header & LOCAL_MESSAGE_TYPE_MASK
            if record_header & DEFINITION_MASK:
                self._read_definition(local_message_type, bool(record_header & DEVELOPER_DATA_MASK))
            else:
                self._read_data(local_message_type)

        self.result.definitions = list(self.history)
        logger.debug(
            "Decode complete",
            definitions=len(self.history),
            messages=len(self.result.messages),
            records=len(self.result.record_timestamps),
            skipped=self._skipped,
        )
        return self.result

    def _take(self, size: int) -> bytes:
        if self.position + size > self.end:
            raise truncated_stream(
                "Record runs past end of data",
                position=self.position,
                size=size,
                data_end=self.end,
            )
        chunk = self.data[self.position:self.position + size]
        self.position += size
        return chunk

    def _read_definition(self, local_message_type: int, has_developer_fields: bool) -> None:
        fixed = self._take(5)
        try:
            byte_order = ByteOrder(fixed[1])
        except ValueError:
            raise malformed_record(
                "Invalid architecture byte",
                architecture=fixed[1],
                position=self.position - 4,
            ) from None
        global_message_number = struct.unpack(byte_order.struct_prefix + 'H', fixed[2:4])[0]

        raw_fields = self._take(fixed[4] * 3)
        fields = tuple(
            FieldDefinition(*raw_fields[i:i + 3]) for i in range(0, len(raw_fields), 3)
        )

        developer_fields: Tuple[DeveloperFieldDefinition, ...] = ()
        if has_developer_fields:
            count = self._take(1)[0]
            raw_dev = self._take(count * 3)
            developer_fields = tuple(
                DeveloperFieldDefinition(*raw_dev[i:i + 3]) for i in range(0, len(raw_dev), 3)
            )

        total_size = sum(f.size for f in fields) + sum(f.size for f in developer_fields)
        definition = DefinitionMessage(
            local_message_type=local_message_type,
            global_message_number=global_message_number,
            byte_order=byte_order,
            fields=fields,
            total_size=total_size,
            developer_fields=developer_fields,
        )
        self.slots[local_message_type] = definition
        self.history.append(definition)
        logger.debug(
            "Definition record",
            local_message_type=local_message_type,
            global_message_number=global_message_number,
            byte_order=byte_order.name.lower(),
            fields=len(fields),
            developer_fields=len(developer_fields),
        )

    def _read_data(self, local_message_type: int) -> None:
        definition = self.slots[local_message_type]
        if definition is None:
            raise undefined_message(
                "Data record for undefined local message type",
                local_message_type=local_message_type,
                position=self.position - 1,
            )

        start = self.position
        self._take(definition.total_size)

        profile = get_message_profile(definition.global_message_number)
        if profile is None:
            self._skipped += 1
            logger.debug(
                "Skipping unknown message",
                global_message_number=definition.global_message_number,
                size=definition.total_size,
            )
            return

        staged, offset = self._decode_fields(definition, profile, start)
        developer_values = self._decode_developer_fields(definition, offset)

        if definition.global_message_number == FIELD_DESCRIPTION_MESG_NUM:
            self._register_developer_field(staged)
            return

        if profile.name == RECORD_MESSAGE:
            self._commit_record(staged, developer_values)
        else:
            self._commit_message(profile.name, staged)

    def _decode_fields(self, definition: DefinitionMessage, profile: MessageProfile,
                       offset: int) -> Tuple[Dict[str, Any], int]:
        check_invalid = definition.global_message_number not in SENTINEL_EXEMPT_MESSAGES
        staged: Dict[str, Any] = {}
        for field_def in definition.fields:
            field_profile = profile.field(field_def.field_number)
            if field_profile is not None:
                value = self.field_decoder.decode(
                    self.data, offset, field_def.size, field_def.base_type,
                    definition.byte_order, field_profile, check_invalid,
                )
                if value is not None:
                    staged[field_profile.name] = value
            offset += field_def.size
        return staged, offset

    def _decode_developer_fields(self, definition: DefinitionMessage, offset: int) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for dev_def in definition.developer_fields:
            description = self.developer_descriptions.get(
                (dev_def.developer_data_index, dev_def.field_number)
            )
            if description is not None:
                value = self.field_decoder.read(
                    self.data, offset, dev_def.size, description.base_type, definition.byte_order,
                )
                if value is not None:
                    values[description.field_name] = value
                    dev_field = self.result.developer_data.setdefault(
                        description.field_name,
                        DeveloperField(description.field_name, description.units),
                    )
                    dev_field.values.append(value)
            offset += dev_def.size
        return values

    def _register_developer_field(self, staged: Dict[str, Any]) -> None:
        name = staged.get('field_name')
        if name is None or 'developer_data_index' not in staged or 'field_definition_number' not in staged:
            logger.debug("Ignoring incomplete field description", fields=sorted(staged))
            return

        description = DeveloperFieldDescription(
            developer_data_index=staged['developer_data_index'],
            field_definition_number=staged['field_definition_number'],
            field_name=name.replace('\x00', '').lower(),
            base_type=staged.get('fit_base_type_id', 13),
            units=str(staged.get('units', '')).replace('\x00', '').lower(),
            native_field_number=staged.get('native_field_num'),
        )
        key = (description.developer_data_index, description.field_definition_number)
        self.developer_descriptions[key] = description
        logger.debug("Developer field registered", name=description.field_name, units=description.units)

    def _native_developer_names(self) -> Dict[str, DeveloperFieldDescription]:
        return {
            d.field_name: d for d in self.developer_descriptions.values()
            if d.native_field_number is not None
        }

    def _commit_record(self, staged: Dict[str, Any], developer_values: Dict[str, Any]) -> None:
        if developer_values:
            native = self._native_developer_names()
            for name, value in developer_values.items():
                if name in native and (name not in staged or self.overwrite_with_dev_data):
                    staged[name] = value

        if not staged:
            return

        timestamp = staged.pop('timestamp', None)
        if timestamp is not None and timestamp > 0:
            key = timestamp
        elif self._max_timestamp is None:
            key = 0
        else:
            key = self._max_timestamp + 1

        self.result.record_timestamps.append(key)
        if self._max_timestamp is None or key > self._max_timestamp:
            self._max_timestamp = key

        record = self.result.messages.setdefault(RECORD_MESSAGE, {})
        for name, value in staged.items():
            record.setdefault(name, {})[key] = value

    def _commit_message(self, name: str, staged: Dict[str, Any]) -> None:
        if not staged:
            return
        sequence = self._sequence.get(name, 0)
        self._sequence[name] = sequence + 1
        message = self.result.messages.setdefault(name, {})
        for field_name, value in staged.items():
            message.setdefault(field_name, {})[sequence] = value
