from __future__ import annotations


class IntakeError(Exception):
    """
    Error de entrada en un envío de inscripción.
    Cada subclase trae el status HTTP equivalente y un mensaje legible
    para el atleta.
    """
    status_code = 400
    default_message = "Não foi possível processar a inscrição."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingProof(IntakeError):
    status_code = 400
    default_message = "Envie o comprovante de pagamento."


class UnsupportedMediaType(IntakeError):
    status_code = 415
    default_message = "Formato de comprovante não aceito. Envie PDF, JPG, PNG ou WEBP."


class PayloadTooLarge(IntakeError):
    status_code = 413
    default_message = "O comprovante excede o tamanho máximo de 5 MB."


class IncompleteSubmission(IntakeError):
    status_code = 400
    default_message = "Informe a categoria da dupla."


class DuplicateProof(IntakeError):
    status_code = 409
    default_message = "Este comprovante já foi enviado em outra inscrição."


class ReviewError(Exception):
    pass


class NotFound(ReviewError):
    def __init__(self, entry_id):
        self.entry_id = entry_id
        super().__init__(f"Inscrição {entry_id} não encontrada.")


class InvalidTransition(ReviewError):
    pass


class NotificationFailure(Exception):
    """Fallo al avisar por email. Se registra en log y nunca se propaga."""


class StorageUnavailable(Exception):
    """La base de datos no responde. Fatal al arrancar; error 500 en operación."""
