from typing import Dict, List, Optional

from chalicelib.constants.substitute_keys import from_db, to_db
from chalicelib.utils import db as utils_db, exceptions
from chalicelib.utils.data import substitute_keys, parse_int
from chalicelib.utils.logger import logger


class EntityBase:
    collection = None
    record_structure = {}
    not_found_exception = exceptions.RecordNotFound
    not_found_message = 'Record not found'

    required_fields_validation = {}

    def __init__(self, id_):
        self.id_ = id_
        self.record_type: str = ''
        self.extra_fields: Dict = {}

    @classmethod
    def init_by_record(cls, record: Dict):
        kwargs = dict(record)
        substitute_keys(dict_to_process=kwargs, base_keys=from_db)
        id_ = kwargs.pop('id_', None)
        entity = cls(id_=id_, **kwargs)
        # keys outside the record structure are written back untouched
        entity.extra_fields = {key: value for key, value in record.items() if key not in cls.record_structure}
        return entity

    @classmethod
    def _load_records(cls, store=utils_db.get_store) -> List[Dict]:
        records = utils_db.load_all(cls.collection, store=store)
        skipped = [record for record in records if not isinstance(record, dict)]
        if skipped:
            logger.error(f"_load_records ::: {cls.collection=} skipping {len(skipped)} records that are not objects")
        return [record for record in records if isinstance(record, dict)]

    @classmethod
    def get_all(cls, store=utils_db.get_store) -> List:
        return [cls.init_by_record(record) for record in cls._load_records(store=store)]

    @staticmethod
    def _find_record_index(records: List[Dict], id_) -> Optional[int]:
        record_id = parse_int(id_)
        if record_id is None:
            return None
        for index, record in enumerate(records):
            if isinstance(record, dict) and record.get('id') == record_id:
                return index
        return None

    @classmethod
    def init_get_by_id(cls, id_, store=utils_db.get_store):
        logger.info(f"init_get_by_id ::: {cls.collection=} {id_=}")
        records = cls._load_records(store=store)
        index = cls._find_record_index(records, id_)
        if index is None:
            raise cls.not_found_exception(cls.not_found_message)
        return cls.init_by_record(records[index])

    def _to_dict(self) -> Dict:
        """
        Should be re-implemented in each child class
        :return:
        dict of item's attributes
        """
        return {
            'id_': self.id_
        }

    def _to_record(self) -> Dict:
        """
        Item as stored in the collection document, keys in document order
        """
        item = self._to_dict()
        substitute_keys(dict_to_process=item, base_keys=to_db)
        return {**{key: item.get(key) for key in self.record_structure}, **self.extra_fields}

    def _validate_mandatory_fields(self, record: Dict) -> None:
        """
        Raise ValidationException in case if a field has a wrong type
        :return:
        None
        """
        for key, validator_func in self.required_fields_validation.items():
            if validator_func(record.get(key)) is False:
                message = f'Validation error occurred while validating the field={key}'
                logger.error(f"_validate_mandatory_fields ::: {self.record_type=} {message}")
                raise exceptions.ValidationException(message)

    def _to_ui(self) -> Dict:
        return self._to_record()

    def to_ui(self) -> Dict:
        return self._to_ui()
